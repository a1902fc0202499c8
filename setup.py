from setuptools import setup

setup(
    name='pyosm',
    version='0.6.0',
    author='Ian Dees',
    author_email='ian.dees@gmail.com',
    packages=['pyosm'],
    url='http://github.com/iandees/pyosm',
    license='LICENSE.txt',
    description='Reads and edits OSM data through the OSM editing API.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    keywords = ['osm', 'openstreetmap', 'xml', 'api', 'changeset'],
    python_requires='>=3.7',
    install_requires=[
        'lxml',
        'requests',
        'loguru'
    ],
    extras_require={
        'test': [
            'pytest'
        ]
    }
)
