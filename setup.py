import setuptools

setuptools.setup(
    name='time-delta',
    version='0.1.1',
    author='XuZhen86',
    description='Signed time-of-day durations: arithmetic, rounding, formatting and parsing.',
    packages=setuptools.find_packages(include=['time_delta', 'time_delta.*']),
    python_requires='>=3.11,<4',
    install_requires=[
        'absl-py>=2.1.0,<3',
    ],
    extras_require={
        'test': [
            'pytest>=8.0.0,<9',
        ],
    },
    entry_points={
        'console_scripts': [
            'time-delta = time_delta.main:app_run_main',
        ],
    },
)
