from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="walletgen",
    version="0.1.0",
    author="Your Name",
    description="Interactive HD wallet generation from BIP39 mnemonic recovery phrases",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/walletgen",
    packages=find_packages(exclude=["tests", "tests.*", "venv"]),
    python_requires=">=3.8",
    install_requires=[
        "web3>=6.0.0",
        "python-dotenv>=1.0.0",
        "mnemonic>=0.20",
        "eth-account>=0.9.0",
        "eth-utils>=2.0.0",
        "pycryptodome>=3.15.0",
    ],
    extras_require={
        "tests": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "walletgen=walletgen.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
