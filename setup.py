from setuptools import setup, find_packages

version = 1, 0, 0
ver = "{}.{}.{}".format(*version)
with open("README.txt", encoding="utf8") as f: readme = f.read()

setup(
    # Package info
    name = "pixcanvas",
    version = ver,
    license = "GPLv3",
    packages = find_packages(exclude=["tests", "tests.*"]),

    # Dependencies
    python_requires = ">=3.8, <4",
    install_requires = ["pygame>=2.1"],
    extras_require = {"test": ["pytest>=7"]},

    # Details
    description = "A fixed-resolution pygame canvas that is scaled, letterboxed and centred to fit a resizable window",
    long_description = readme,

    # Additional data
    keywords = "graphics canvas viewport letterbox pixel-perfect pygame",
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: pygame",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Games/Entertainment"
    ]
)
