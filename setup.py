from setuptools import setup, find_packages

setup(
    name="lms-assessments-backend",
    version="0.1.0",
    packages=find_packages(include=["lms_backend", "lms_backend.*"]),
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn>=0.15.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "sqlalchemy[asyncio]>=2.0.0",
        "alembic>=1.7.0",
        "aiosqlite>=0.17.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "postgres": [
            "asyncpg>=0.27.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "httpx>=0.24.0",
        ],
    },
    python_requires=">=3.8",
)
