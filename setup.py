from setuptools import setup

with open('requirements.txt') as f:
    reqs = f.read().splitlines()

setup(name='image_concat',
      version='0.1',
      description='Concatenate images horizontally into a single image',
      packages=['image_concat'],
      install_requires=reqs,
      extras_require={'test': ['pytest']},
      python_requires='>=3.8',
      entry_points={'console_scripts': ['image-concat = image_concat.main:main']})
