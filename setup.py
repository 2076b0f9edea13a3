import setuptools

setuptools.setup(
    name="softraster",
    version="0.1.0",
    description="A minimal software rasterizer over in-memory RGBA framebuffers.",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
