from setuptools import setup, find_namespace_packages

setup(
    name="config_locator",
    version="0.1.0",
    packages=find_namespace_packages(include=["src", "src.*"]),
    python_requires=">=3.10",
    install_requires=["PyYAML>=6.0"],
    extras_require={"test": ["pytest"]},
    description="Find a YAML config file in parent directories and merge local overrides",
)
