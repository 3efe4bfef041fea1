from setuptools import setup

setup(name='vgview',
      version='0.1.0',
      description='Pan and zoom viewer for text labels on a GPU backed surface',
      author='nat',
      license='MIT',
      packages=['vgview'],
      install_requires=['numpy', 'pygame'],
      extras_require={'test': ['pytest']},
      entry_points={
          'gui_scripts': [ 'vgview=vgview:main' ],
      },
      zip_safe=False)
