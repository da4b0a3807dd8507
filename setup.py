from setuptools import setup, find_packages

setup(
    name='tweetauth',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    package_data={
        'tweetauth': ['templates/flow/*.html'],
    },
    python_requires='>=3.8',
    install_requires=[
        'flask',
        'authlib',
        'requests',
        'oauthlib',
        'flask-caching',
        'marshmallow>=3.18',
        'tenacity',
    ],
    extras_require={
        'redis': ['redis'],
        'test': ['pytest', 'pytest-flask', 'pytest-mock', 'python-dotenv'],
    },
    tests_require=[
        'pytest',
        'pytest-flask',
        'pytest-mock',
        'python-dotenv',
    ],
)
