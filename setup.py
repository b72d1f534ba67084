from setuptools import setup, find_packages

setup(
    name='sitemap-model',
    version='0.1.0',
    license="Apache 2.0",
    description="Normalize home-automation sitemap payloads (XML, JSON and widget events) into flat widget trees",
    long_description=open('README.md').read(),  # Ensure the README.md exists and is correct
    long_description_content_type='text/markdown',  # Use 'text/markdown' for Markdown files
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        'click>=8.0',
        'pydantic>=2.0',
        'PyYAML>=6.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'sitemap-dump=sitemap_model.command.sitemap_dump:run',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.9',
)
