from setuptools import setup, find_packages
setup(
  name = 'printlog',
  packages = find_packages(exclude=['tests', 'tests.*']),
  version = '0.1',
  license='MIT',
  description = 'Leveled console/file print helpers with colorized severity tags and caller locations',
  keywords = ['logging', 'print', 'console', 'color'],
  python_requires='>=3.8',
  install_requires=[
          'loguru>=0.6.0',
      ],
  extras_require={
          'test': ['pytest>=7.0'],
      },
  classifiers=[
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Developers',
    'Topic :: System :: Logging',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.8',
    'Programming Language :: Python :: 3.9',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
  ],
)
