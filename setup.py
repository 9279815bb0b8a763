"""
Setup configuration for splits-deploy package.

This package deploys the Token and SplitsWarehouseMock smart contracts from
their compiled Hardhat artifacts.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read version from package
version_file = Path(__file__).parent / "splits_deploy" / "__init__.py"
version = "0.1.0"  # Default version
if version_file.exists():
    with open(version_file) as f:
        for line in f:
            if line.startswith("__version__"):
                version = line.split("=")[1].strip().strip('"').strip("'")
                break

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    with open(readme_file, encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="splits-deploy",
    version=version,
    description="Deploy the Token and SplitsWarehouseMock contracts to an Ethereum node",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    include_package_data=True,
    package_data={
        "splits_deploy": [
            "data/artifacts/**/*.json",
        ],
    },
    install_requires=[
        "web3>=7.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "web3[tester]>=7.0.0",
            "eth-tester[py-evm]>=0.12.0b1",
            "eth-abi>=5.0.0",
            "eth-account>=0.13.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "splits-deploy=splits_deploy.deploy:main",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Build Tools",
        "Topic :: System :: Distributed Computing",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    keywords="ethereum, blockchain, hardhat, smart-contracts, web3, deployment, splits",
)
