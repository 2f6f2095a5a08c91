from setuptools import setup, find_packages

setup(
    name="podium_detection",
    version="0.1.0",
    description="Player count and victor banner fingerprints from Duck Game podium screenshots",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "opencv-python>=4.8.0",
        "numpy>=1.24.0",
        "Pillow>=9.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
