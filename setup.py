import sys

from pathlib import Path
from setuptools import setup

root_dir = Path(__file__).parent
with open(root_dir / "README.md") as f:
    readme = f.read()

extras_require = {
    "dev": ["pytest", "nox", "ruff", "mypy"],
}

if sys.version_info < (3, 12):
    # There is currently no atheris support for Python 3.12
    extras_require["dev"].append("atheris")

setup(
    name="adc.six",
    version="0.1.0",
    packages=["adc"],
    package_data={"adc": ["py.typed"]},
    install_requires=[],
    extras_require=extras_require,
    description="Streaming decoder for Apple Data Compression (ADC)",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    keywords=[
        "adc",
        "apple data compression",
        "decompression",
        "dmg",
    ],
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: 3 :: Only",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: System :: Archiving :: Compression",
    ],
)
