from setuptools import setup, find_namespace_packages

setup(
    name="aws_config_rule_status",
    version="1.0.0",
    description="AWS Config rule and recorder status reporting with Slack notifications",
    long_description="See DESIGN.md for full documentation.",
    long_description_content_type="text/markdown",
    license="MIT",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["config_rule_status", "config_rule_status.*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.28.0",
        "boto3>=1.26.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Security",
        "Topic :: System :: Monitoring",
    ],
)
