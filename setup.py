from setuptools import setup, find_packages

setup(
    name='solarposition',
    version='0.1.0',
    description='Solar position algorithms (PSA, NOAA, Walraven, USNO, SPA) with atmospheric refraction models',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.8',
    install_requires=['numpy >= 1.19.4', 'pandas >= 1.1'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['solarposition = solarposition.cli:main']},
)
