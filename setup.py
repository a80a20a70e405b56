import setuptools

setuptools.setup(
  name='geodata-builder',
  version='0.1',
  description='Converts area code to location text tables into the binary files used by a phone number geocoder',
  packages=['geodata_builder'],
  python_requires='>=3.7',
  entry_points={
    'console_scripts': ['geodata-builder=geodata_builder.generate:main'],
  },
  zip_safe=False
)
