from setuptools import setup, find_packages
setup( 
    name = "roaster",
    version = "0.1.0.dev1",
    description = "Encode python object graphs into javascript functions",
    author = "Various Developers",
    packages = find_packages(exclude=['tests']),
    install_requires = [
        'attrs',
        ],
    extras_require = {
        'test': ['pytest'],
        },
    python_requires='>=3.7',
    )
