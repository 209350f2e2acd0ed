import ast

from setuptools import setup

with open('src/solarspa/__init__.py') as f:
    docstring = ast.get_docstring(ast.parse(f.read()))

description, long_description = docstring.split('\n', 1)

setup(
    name='solarspa',
    version='0.1.0',
    author="Quinton Barnes",
    author_email="devqbizzle68@gmail.com",
    description=description,
    long_description=long_description,
    long_description_content_type='text/plain',
    license='MIT',
    url='https://github.com/qbizzle68/solarspa',
    python_requires='>=3.10',
    install_requires=['pyevspace>=0.14.0,<0.16'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Astronomy'
    ],
    packages=['solarspa', 'solarspa.bodies', 'solarspa.core', 'solarspa.util'],
    package_dir={'': 'src'},
)
