"""Setup file for mushroom-bot package."""
from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="mushroom-bot",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.109.0",
        "uvicorn[standard]>=0.27.0",
        "pydantic>=2.5.3",
        "pydantic-settings>=2.1.0",
        "httpx>=0.26.0",
        "structlog>=24.1.0",
        "google-auth>=2.23.0",
        "google-api-core>=2.15.0",
        "google-cloud-dialogflow>=2.25.0",
        "google-cloud-vision>=3.5.0",
        "google-cloud-translate>=3.12.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mushroom-bot=mushroom_bot.main:run",
        ],
    },
)
