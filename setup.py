from setuptools import find_packages, setup

setup(name='schreier-vector',
      version='0.1.0',
      description='Orbits, Schreier vectors and stabilizer generators of '
      'permutation groups',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.9',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']})
