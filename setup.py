from setuptools import setup

setup(
    name='atmfjstc-underbar',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.underbar'],

    install_requires=[
        'atmfjstc-py-lang-utils>=1.11, <2',
    ],

    zip_safe=True,

    description="Underscore-style helpers for processing collections and decorating functions",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Typing :: Typed",
    ],
    python_requires='>=3.8',
)
