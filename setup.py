from setuptools import setup, find_packages

setup(
    name="skillboard",
    version="0.1.0",
    packages=find_packages(include=["skillboard", "skillboard.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        # passlib 1.7 cannot drive bcrypt 5
        "bcrypt<5",
        "pydantic[email]>=2",
        "pydantic-settings",
        "python-dotenv",
        "alembic",
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
