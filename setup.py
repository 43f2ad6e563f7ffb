from setuptools import find_packages, setup


setup(
    name="cornerfilters",
    version="0.1.0",
    description="Gaussian smoothing and structure-tensor feature strength for 2D images",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=["numpy>=1.21", "Pillow"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["cornerfilters = cornerfilters.cli:main"]},
    include_package_data=True,
)
