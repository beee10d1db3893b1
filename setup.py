from setuptools import setup, find_packages

setup(
    name="portfolio-rebalancer",
    version="1.0.0",
    author="Portfolio Rebalancer Team",
    description="Portfolio rebalancing calculator with single-snapshot persistence",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "portfolio_base": ["py.typed"],
        "rebalance_calculator": ["py.typed"],
        "rebalancer_config": ["py.typed"],
        "rebalancer_app": ["py.typed"],
    },
    install_requires=[
        "pydantic==2.11.7",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "portfolio-rebalancer=rebalancer_app.main:main",
        ],
    },
    python_requires=">=3.11",
)
