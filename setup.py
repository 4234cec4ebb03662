from setuptools import setup, find_packages


setup(name='intersection',
      version='0.1.1.dev0',
      packages=find_packages(),
      description='intersection: intersect any number of sets',
      long_description=open('README.md').read(),
      long_description_content_type="text/markdown",
      author='intersection Developers',
      license='Revised BSD',
      install_requires=['pyomo>=6.0', 'numpy'],
      extras_require={'tests': ['pytest']},
      include_package_data=True,
      scripts=[],
      python_requires='>=3.7',
      classifiers=["Programming Language :: Python :: 3",
                   "License :: OSI Approved :: BSD License",
                   "Operating System :: OS Independent"])
