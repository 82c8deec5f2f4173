import os
from setuptools import setup, find_packages

project_dir = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(project_dir, 'version.txt')) as f:
    version = f.read().rstrip()


def read_requirements(file_name):
    with open(os.path.join(project_dir, file_name)) as f:
        return [
            line.split()[0]
            for line in f
            if line.strip() and not line.startswith('#')
        ]


setup(
    name='cloudiot-token',
    version=version,
    description='Exchange a Cloud IoT device JWT for a Google Cloud access token',
    packages=find_packages(),
    license='MPL2',
    install_requires=read_requirements('requirements.txt.in'),
    extras_require={
        'test': read_requirements('requirements-test.txt.in'),
    },
    python_requires='>=3.9',
    classifiers=(
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
    ),
)
