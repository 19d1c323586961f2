"""Setup for cloudways_varnish"""
from setuptools import find_packages, setup

setup(
    name='cloudways-varnish',
    version='1.0.0',
    description='Enable, disable or purge Varnish on a Cloudways server from CI.',
    packages=find_packages(include=['cloudways_varnish', 'cloudways_varnish.*']),
    python_requires=">=3.8",
    install_requires=[
        'click',
        'click-log',
        'PyYAML',
        'requests',
    ],
    extras_require={
        'test': [
            'ddt',
            'mock',
            'pytest',
            'responses',
        ],
    },
    entry_points={
        'console_scripts': [
            'cloudways-varnish = cloudways_varnish.scripts.varnish_action:varnish_action',
        ],
    },
)
