from setuptools import setup  # type: ignore

setup(
    name="pullgate",
    version="0.0.0",
    python_requires=">=3.11",
    packages=[
        "pullgate",
        "pullgate.api",
        "pullgate.api.endpoints",
        "pullgate.api.infra",
        "pullgate.api.infra.github",
        "pullgate.application",
        "pullgate.application.pull_request",
        "pullgate.common",
        "pullgate.domain",
        "pullgate.domain.repo",
    ],
    install_requires=[
        "fastapi",
        "githubkit",
        "python-dotenv",
        "starlette",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "httpx",
            "pytest",
        ],
    },
)
