from setuptools import setup, find_packages


setup(
    name='orientlib',
    version='1.0.0',
    description='Immutable 3D vector, matrix, and rotation value types with closed form rotation conversions',
    packages=find_packages(include=['orientlib', 'orientlib.*']),
    python_requires='>=3.11',
    install_requires=['numpy', 'pandas'],
    extras_require={'test': ['pytest', 'scipy']},
)
