from setuptools import setup, find_packages

setup(
    name="othello",
    version="0.1.0",
    packages=find_packages(include=["othello", "othello.*"]),
    install_requires=[
        'numpy>=1.19.0',
        'torch>=1.8.0',
        'tensorboard>=2.4.0',
        'tqdm>=4.50.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.8',
)
