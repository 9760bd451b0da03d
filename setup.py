from setuptools import setup, find_packages

with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='gffplot',
    version='0.2.0',
    packages=find_packages(exclude=['tests']),
    description='Plot GFF3 annotations of small genomes as a self-contained interactive HTML/SVG page.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=['gffutils>=0.12', 'PyYAML>=5.4.0', 'loguru>=0.5.3'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['gffplot = gffplot.main:main']},
    package_data={'gffplot': ['config/gffplot.yaml']},
    include_package_data=True,
    python_requires='>=3.8',
)
