from typing import Dict, Optional


class BearerAuth:
    """Produces the authentication headers attached to every call.

    The key is only held here; endpoint clients ask for headers and never
    see the credential itself.
    """

    def __init__(self, api_key: str, organization: Optional[str] = None) -> None:
        self._api_key = api_key
        self._organization = organization

    def headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Authorization": f"Bearer {self._api_key}"}
        if self._organization:
            headers["OpenAI-Organization"] = self._organization
        return headers

    def __repr__(self) -> str:
        return f"BearerAuth(organization={self._organization!r})"
