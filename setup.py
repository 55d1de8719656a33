"""
Packaging script for PyPI.
"""
import setuptools
from pathlib import Path

try:
	from boozetools.macroparse.runtime import make_tables
except ImportError:
	pass
else:
	make_tables(Path(__file__).parent / "glambda" / "Glambda.md")

setuptools.setup(
	name='glambda',
	version='1.0.2',
	packages=['glambda', ],
	package_data={
		'glambda': ["Glambda.md", "Glambda.automaton"],
	},
	entry_points={
		'console_scripts': ["glambda = glambda.cmdline:main"],
	},
	license='BSD',
	description='An interactive console for a simply-typed lambda calculus with integers and booleans',
	long_description=open('README.md', encoding='utf-8').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.3",
	],
	extras_require={
		"test": ["pytest"],
	},
)
