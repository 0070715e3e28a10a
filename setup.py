"""
Setup configuration for the Task Store API package
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="task-store-api",
    version="1.0.0",
    description="In-memory task list REST API built on FastAPI",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["task_store", "task_store.*", "api", "api.*"]),
    py_modules=["start_api"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Framework :: FastAPI",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.100",
        "uvicorn[standard]>=0.23",
        "pydantic>=2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "httpx>=0.24",
        ],
    },
)
