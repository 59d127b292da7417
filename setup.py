from setuptools import find_packages, setup

setup(
  name="jubsig",
  version="0.1.0",
  author="Jubsig developers",
  description="Deterministic EdDSA signatures on Jubjub with a Poseidon tree digest",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(include=["jubsig", "jubsig.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "colorama>=0.4",
    "tqdm>=4.62",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(
    console_scripts=["jubsig = jubsig.cli.__main__:main"],
  ),
)
