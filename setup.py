from setuptools import setup, find_packages

with open("requirements.txt", "r") as f:
    requirements = f.read().splitlines()

setup(
    name="llm_client",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "fastapi",
        ],
    },
    python_requires=">=3.9",
)
