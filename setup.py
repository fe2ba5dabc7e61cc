"""
Setup script for yomitoki package.

Yomitoki is a Python library that parses Japanese text with a
morphological analyzer and reduces it to its kana reading.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="yomitoki",
    version="0.1.0",
    author="Noyu Ritsuji",
    author_email="",
    description="Japanese morphological parsing and kana readings over MeCab",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["yomitoki", "yomitoki.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
        "Natural Language :: Japanese",
    ],
    python_requires=">=3.8",
    install_requires=[
        "mecab-python3>=1.0.6",
    ],
    extras_require={
        "japanese": [
            "sudachipy>=0.6.0",
            "sudachidict_core>=20220729",
        ],
        "web": [
            "fastapi>=0.100.0",
            "uvicorn>=0.22.0",
            "python-multipart>=0.0.6",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "httpx>=0.24.0",
            "fastapi>=0.100.0",
            "python-multipart>=0.0.6",
            "black>=21.0",
            "flake8>=3.9",
            "mypy>=0.900",
        ],
    },
    keywords=[
        "mecab",
        "sudachi",
        "morphological analysis",
        "japanese",
        "kana",
        "reading",
        "nlp",
    ],
)
