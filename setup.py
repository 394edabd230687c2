from setuptools import find_packages, setup
import os


def local_file(name):
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))

SOURCE = local_file("src")
README = local_file("README.rst")


setup(
    name='propcheck',
    version="0.1.0",
    packages=find_packages(SOURCE),
    package_dir={"": SOURCE},
    license='MIT',
    description=(
        'Property based testing with lazily shrinking generators'),
    zip_safe=False,
    python_requires='>=3.11',
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    install_requires=['click'],
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    long_description=open(README).read(),
    entry_points={
        'console_scripts': [
            'propcheck=propcheck.__main__:main'
        ]
    }
)
