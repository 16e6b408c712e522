import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="evalsplits",
    version="0.1.0",
    description="Deterministic train/test split generation for model evaluation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.17",  # np.random.Generator / PCG64
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
