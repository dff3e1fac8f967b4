from setuptools import setup

setup(
  name='crawlstore',
  packages=['crawlstore', 'crawlstore.storages'],
  version='0.1.0',
  description='Pluggable memory/file content storage for crawl results',
  license='MIT',
  install_requires=[
    'termcolor>=2.1'
  ],
  extras_require={
    'test': ['pytest'],
  },
  python_requires='>=3.11',
)
