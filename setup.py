"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='frozen-fruit',
	version='0.0.1',
	packages=['frozen_fruit', ],
	entry_points={
		'console_scripts': ["frozen-fruit-types = frozen_fruit.emitter:main"],
	},
	license='MIT',
	description='Unbound, renamed, frozen references to the built-ins, taken before anyone can patch them',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
		"Topic :: Software Development :: Code Generators",
		"Environment :: Console",
    ],
	python_requires='>=3.12',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
