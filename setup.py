# isort: STDLIB
import os

# isort: THIRDPARTY
import setuptools


def local_file(name):
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))


README = local_file("README.rst")

with open(local_file("src/hal_client_udisks/_version.py"), encoding="utf-8") as o:
    exec(o.read())  # pylint: disable=exec-used

setuptools.setup(
    name="hal-client-udisks",
    version=__version__,  # pylint: disable=undefined-variable
    description="legacy HAL device and property queries answered by UDisks2",
    long_description=open(README, encoding="utf-8").read(),
    platforms=["Linux"],
    license="Apache 2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Hardware",
    ],
    python_requires=">=3.6",
    install_requires=[
        "dbus-python",
        "dbus-python-client-gen>=0.7",
        "into-dbus-python>=0.08",
    ],
    extras_require={"test": ["hypothesis", "pytest"]},
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    scripts=["scripts/hal_flash.py"],
)
