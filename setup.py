"""
Setup configuration for the ta-stream package
Streaming technical analysis indicators
"""

from setuptools import setup, find_packages

# Read long description from README
def read_long_description():
    try:
        with open("README.md", "r", encoding="utf-8") as fh:
            return fh.read()
    except FileNotFoundError:
        return "Streaming technical analysis indicators with O(1) updates"

setup(
    name="ml-framework-ta-stream",
    version="0.5.0",
    author="ML-Framework Team",
    author_email="dev@ml-framework.dev",
    description="Streaming technical analysis indicators: EMA, SMA, RSI, MACD, Stochastic, Bollinger Bands and more",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Financial and Insurance Industry",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Office/Business :: Financial :: Investment",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-benchmark>=4.0.0",
            "pandas>=1.3.0",
        ],
        "dev": [
            "ml-framework-ta-stream[test]",
            "black>=22.0.0",
            "flake8>=5.0.0",
            "mypy>=0.991",
        ],
    },
    include_package_data=True,
    package_data={
        "ta_stream": ["py.typed"],
    },
    zip_safe=False,
    keywords=[
        "trading", "technical-analysis", "indicators", "streaming",
        "ema", "macd", "rsi", "stochastic", "bollinger-bands", "numpy",
    ],
)
