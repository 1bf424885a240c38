"""Module doscstring to make pylint STFU."""

import re
import setuptools

with open('jotform_util/consts.py', 'r', encoding='utf-8') as reader:
    __version__ = re.search(r'__version__ = "(.+?)"', reader.read()).group(1)

with open('README.md', 'r', encoding='utf-8') as reader:
    long_description = reader.read()

packages = setuptools.find_packages(exclude=['tests', 'tests.*'])

setuptools.setup(
    name='jotform-util',
    version=__version__,
    description='A thin python client for the JotForm REST API.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=['requests'],
    extras_require={
        'test': ['pytest'],
    },
    keywords=['python', 'jotform', 'api', 'automation', 'form', 'python3',
              'submissions', 'rest', 'integration', 'client'],
    classifiers=[
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Development Status :: 5 - Production/Stable',
        'Topic :: Utilities',
        'Typing :: Typed',
        'Operating System :: OS Independent',
    ],
    packages=packages,
    python_requires='>=3.8',
)
