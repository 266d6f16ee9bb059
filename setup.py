from setuptools import find_packages, setup

setup(
    name="setup-luarocks",
    version="1.0.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=["argcomplete", "jinja2", "pyyaml", "requests", "tqdm"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["setup-luarocks=setup_luarocks.cli:main"]},
)
