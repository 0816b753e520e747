from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="i3-save-tree",
    version="0.1",
    description="Dump i3 and Sway layouts as editable append_layout files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Troels Bjørnskov",
    author_email="troels@bjoernskov.org",
    url="https://github.com/trbjo/AsyncSwayIPC",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "Orjson",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "i3-save-tree=i3_save_tree.run:main",
        ],
    },
    python_requires=">=3.11",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
)
