"""Setup script for the project."""

from setuptools import setup, find_packages

setup(
    name="lifesync-api",
    version="1.0.0",
    description="Goals, daily schedules and profiles backend for the LifeSync app",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "motor>=3.3",
        "pymongo>=4.6",
        "httpx>=0.27",
        "PyJWT>=2.8",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    python_requires=">=3.10",
)
