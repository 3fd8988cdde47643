from setuptools import setup, find_packages

setup(
    name="isopath",
    version="0.1.0",
    description="Movement and connectivity engine for perspective-illusion puzzle levels.",
    packages=find_packages(where=".", include=("isopath", "isopath.*")),
    package_dir={"": "."},
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "isopath-inspect=isopath.inspect_level:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.8",
)
