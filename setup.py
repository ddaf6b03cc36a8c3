"""Package setup for am_i_home."""

from setuptools import setup, find_packages

setup(
    name="am-i-home",
    version="1.0.0",
    description="Check which devices are connected to a Vodafone HomeStation router",
    packages=find_packages(include=["am_i_home", "am_i_home.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "colorlog>=6.8.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "am-i-home=am_i_home.cli:main",
        ],
    },
)
