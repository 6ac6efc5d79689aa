from setuptools import setup, find_packages

setup(
    name="igc-tracklog",
    version="1.0.0",
    description="IGC Tracklog - Parses IGC flight logs into flight metadata, fixes and GeoJSON tracks",
    author="Juan Luis Gabriel",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
            "aerofiles",  # For writing IGC fixtures in tests
            "python-dateutil",  # Required by aerofiles.igc but not declared by it
        ],
    },
    entry_points={
        'console_scripts': [
            'igc-tracklog=main:main',
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
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: GIS",
        "Operating System :: OS Independent",
    ],
)
