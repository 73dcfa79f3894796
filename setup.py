"""Setup for DeepSeek Python SDK"""

from setuptools import setup, find_packages

setup(
    name="deepseek-sdk",
    version="0.1.0",
    description="Async Python client for the DeepSeek chat completion API",
    author="DeepSeek SDK Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "httpx>=0.26.0",
        "pydantic>=2.5.0",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.11",
)
