from setuptools import find_packages, setup

install_requires = [
    # for quote provider
    "requests",
    # for settings and logging config
    "PyYAML",
    # for api key
    "python-dotenv",
]

setup(
    name="lot_calculator",
    version="0.0.1",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"lot_calculator": ["settings.yaml", "logging.yaml", "logging_test.yaml"]},
    install_requires=install_requires,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    include_package_data=True,
)
