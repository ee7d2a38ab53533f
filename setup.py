import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("blocknum/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="blocknum",
    version=version,
    description="Arbitrary precision decimal arithmetic, a block of digits at a time.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.6',
    entry_points={
        'console_scripts': [
            'blocknum = blocknum.calculator:main',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
            # bignum
            # decimal
            # calculator
    ],
)
