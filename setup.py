# I'd have preferred a setup.cfg, but `pip -e` rejects it.

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="ferrers",
    version="0.0.1",
    description="Random integer partitions and geometric partition bijections",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    packages=setuptools.find_packages(exclude=["test", "test.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["ddt"]},
    python_requires=">=3.7",
)
