import pytest
from pydantic import ValidationError as PydanticValidationError

from llm_client.builders import ChatRequestBuilder, ImageRequestBuilder
from llm_client.errors import ValidationError
from llm_client.schemas.chat import (
    ChatRequest,
    Message,
    ResponseFormat,
    Tool,
    ToolChoiceFunction,
    ToolChoiceMode,
)


@pytest.mark.parametrize("setter", ["frequency_penalty", "presence_penalty"])
@pytest.mark.parametrize("value", [-2.0, -0.5, 0.0, 1.5, 2.0])
def test_penalty_within_bounds_accepted(setter, value):
    builder = ChatRequestBuilder()
    getattr(builder, setter)(value)
    assert getattr(builder.build(), setter) == value


@pytest.mark.parametrize("setter", ["frequency_penalty", "presence_penalty"])
@pytest.mark.parametrize("value", [-2.01, -3, 2.0001, 100])
def test_penalty_out_of_bounds_rejected(setter, value):
    with pytest.raises(ValidationError) as exc_info:
        getattr(ChatRequestBuilder(), setter)(value)
    message = str(exc_info.value)
    # names the field, the range and the offending value
    assert setter in message
    assert "-2.0 and 2.0" in message
    assert str(value) in message


@pytest.mark.parametrize("value", [0, 3, 5])
def test_top_logprobs_bounds_accepted(value):
    request = ChatRequestBuilder().logprobs(True).top_logprobs(value).build()
    assert request.top_logprobs == value


@pytest.mark.parametrize("value", [-1, 6])
def test_top_logprobs_out_of_bounds_rejected(value):
    with pytest.raises(ValidationError, match="top_logprobs"):
        ChatRequestBuilder().top_logprobs(value)


@pytest.mark.parametrize("setter", ["max_tokens", "n"])
def test_positive_counts(setter):
    builder = ChatRequestBuilder()
    getattr(builder, setter)(1)
    assert getattr(builder.build(), setter) == 1
    with pytest.raises(ValidationError, match=setter):
        getattr(builder, setter)(0)
    with pytest.raises(ValidationError, match=setter):
        getattr(builder, setter)(-5)


def test_temperature_and_top_p_bounds():
    request = ChatRequestBuilder().temperature(2).top_p(0).build()
    assert request.temperature == 2
    assert request.top_p == 0
    with pytest.raises(ValidationError, match="temperature"):
        ChatRequestBuilder().temperature(-0.1)
    with pytest.raises(ValidationError, match="top_p"):
        ChatRequestBuilder().top_p(1.5)


def test_stop_up_to_four_in_one_call():
    request = ChatRequestBuilder().stop("a", "b", "c", "d").build()
    assert request.stop == ("a", "b", "c", "d")


def test_stop_fifth_sequence_in_one_call_rejected():
    with pytest.raises(ValidationError, match="Up to 4 stop sequences"):
        ChatRequestBuilder().stop("a", "b", "c", "d", "e")


def test_stop_limit_enforced_across_calls_at_offending_append():
    builder = ChatRequestBuilder().stop("a", "b").stop("c")
    builder.stop("d")
    with pytest.raises(ValidationError, match="but it was 5"):
        builder.stop("e")
    # the rejected call left the accumulated sequences untouched
    assert builder.build().stop == ("a", "b", "c", "d")


def test_rejected_batch_adds_nothing():
    builder = ChatRequestBuilder().stop("a", "b", "c")
    with pytest.raises(ValidationError):
        builder.stop("d", "e")
    assert builder.build().stop == ("a", "b", "c")


def test_messages_and_tools_append_in_order():
    weather = Tool.function_tool("get_weather", parameters={"type": "object"})
    clock = Tool.function_tool("get_time")
    request = (
        ChatRequestBuilder()
        .message(Message.system("be brief"))
        .messages([Message.user("hi"), Message.assistant("hello")])
        .message(Message.user("weather?"))
        .tool(weather)
        .tools([clock])
        .build()
    )
    assert [m.role for m in request.messages] == ["system", "user", "assistant", "user"]
    assert request.messages[-1].content == "weather?"
    assert request.tools == (weather, clock)


def test_build_collapses_empty_lists_to_absent():
    request = ChatRequestBuilder().build()
    assert request.model == "gpt-3.5-turbo"
    assert request.messages is None
    assert request.stop is None
    assert request.tools is None
    assert request.tool_choice is None


def test_built_request_is_frozen_and_independent_of_builder():
    bias = {50256: -100}
    builder = ChatRequestBuilder("gpt-4").message(Message.user("one")).logit_bias(bias)
    first = builder.build()
    builder.message(Message.user("two")).stop("x")
    bias[1] = 5
    second = builder.build()

    assert len(first.messages) == 1
    assert first.stop is None
    assert first.logit_bias == {50256: -100}
    assert len(second.messages) == 2
    assert isinstance(first.messages, tuple)
    with pytest.raises(PydanticValidationError):
        first.model = "other"


def test_tool_choice_variants():
    assert ChatRequestBuilder().tool_choice("auto").build().tool_choice == ToolChoiceMode(
        mode="auto"
    )
    assert ChatRequestBuilder().tool_choice_function(
        "get_weather"
    ).build().tool_choice == ToolChoiceFunction(name="get_weather")
    explicit = ToolChoiceMode(mode="none")
    assert ChatRequestBuilder().tool_choice(explicit).build().tool_choice == explicit


def test_tool_choice_unknown_mode_rejected():
    with pytest.raises(ValidationError, match="tool_choice"):
        ChatRequestBuilder().tool_choice("sometimes")


def test_empty_model_rejected():
    with pytest.raises(ValidationError, match="model"):
        ChatRequestBuilder().model("  ")


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        ChatRequestBuilder().n(0)


def test_response_format_and_misc_fields():
    request = (
        ChatRequestBuilder()
        .response_format(ResponseFormat.json())
        .seed(42)
        .user("user-1")
        .build()
    )
    assert request.response_format.type == "json_object"
    assert request.seed == 42
    assert request.user == "user-1"


def test_request_model_enforces_bounds_when_built_directly():
    with pytest.raises(PydanticValidationError):
        ChatRequest(model="m", frequency_penalty=3.0)
    with pytest.raises(PydanticValidationError):
        ChatRequest(model="m", stop=("a", "b", "c", "d", "e"))


def test_image_builder():
    request = (
        ImageRequestBuilder("a red fox")
        .model("dall-e-3")
        .n(1)
        .size("1024x1024")
        .response_format("b64_json")
        .build()
    )
    assert request.prompt == "a red fox"
    assert request.response_format == "b64_json"
    assert request.quality is None


def test_image_builder_validation():
    with pytest.raises(ValidationError, match="prompt"):
        ImageRequestBuilder("")
    with pytest.raises(ValidationError, match="n must be a positive number"):
        ImageRequestBuilder("fox").n(0)
    with pytest.raises(ValidationError, match="response_format"):
        ImageRequestBuilder("fox").response_format("png")


@pytest.mark.parametrize("setter", ["top_logprobs", "max_tokens", "n", "seed"])
@pytest.mark.parametrize("value", [2.5, 3.0, True, "3", None])
def test_integer_setters_reject_non_integers(setter, value):
    with pytest.raises(ValidationError, match=f"{setter} must be an integer"):
        getattr(ChatRequestBuilder(), setter)(value)


def test_fractional_top_logprobs_rejected_before_build():
    builder = ChatRequestBuilder()
    with pytest.raises(ValidationError, match="top_logprobs"):
        builder.top_logprobs(2.5)
    # nothing was recorded, so build still succeeds
    assert builder.build().top_logprobs is None


@pytest.mark.parametrize(
    "setter", ["frequency_penalty", "presence_penalty", "temperature", "top_p"]
)
@pytest.mark.parametrize("value", [False, "0.5", None])
def test_numeric_setters_reject_non_numbers(setter, value):
    with pytest.raises(ValidationError, match=f"{setter} must be a number"):
        getattr(ChatRequestBuilder(), setter)(value)


def test_image_n_rejects_bool():
    with pytest.raises(ValidationError, match="n must be an integer"):
        ImageRequestBuilder("fox").n(True)
