import setuptools
import os.path

# The directory containing this file
HERE = os.path.abspath(os.path.dirname(__file__))

# The text of the README file
with open(os.path.join(HERE, "README.md")) as fid:
    README = fid.read()

with open(os.path.join(HERE, "requirements.txt")) as fid:
    requirements = fid.read().split()

setuptools.setup(
    name="gohooks",
    version="0.1.0",
    description="Git hooks checking commit messages and staged Go and shell sources.",
    long_description=README,
    long_description_content_type="text/markdown",
    license="",
    python_requires=">=3.8",
    packages=["gohooks", "gohooks.checkers"],
    zip_safe=False,
    maintainer="",
    maintainer_email="",
    url="",
    entry_points={"console_scripts": [
        "gohooks=gohooks.__main__:main",
        "gohooks-install=gohooks.install:main",
    ]},
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
)
