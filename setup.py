from setuptools import setup, find_packages

setup(
    name="heap-sift",
    version="0.1.0",
    packages=find_packages(exclude=["test"]),
    py_modules=["utils", "ui", "bench_utils", "bench"],
    install_requires=[
        "numpy",
        "runstats",
        "sortedcontainers",
    ],
    extras_require={"test": ["pytest"]},
)
