from setuptools import setup, find_namespace_packages

setup(
    name="artwork_gallery",
    version="1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["artwork_gallery", "artwork_gallery.*"]),
    py_modules=["main"],
    install_requires=[
        "requests",
        "PyQt5",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-qt",
        ],
    },
    entry_points={
        "gui_scripts": [
            "artwork_gallery=main:main",
        ],
    },
)
