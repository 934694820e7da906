from setuptools import setup


setup(
    version="1.0.0",
    name="oai-metadata-map",
    description=(
        "flask app and library mapping repository entities onto OAI "
        + "metadata profiles"
    ),
    author="LZV.nrw",
    license="MIT",
    python_requires=">=3.10",
    install_requires=[
        "flask==3.*",
        "PyYAML==6.*",
        "lxml==5.*",
        "data-plumber-http>=1.0.0,<2",
        "dcm-common[services]>=3.25.0,<4",
    ],
    packages=[
        "oai_metadata_map",
        "oai_metadata_map.components",
        "oai_metadata_map.models",
        "oai_metadata_map.plugins",
        "oai_metadata_map.plugins.mapping",
        "oai_metadata_map.views",
    ],
    package_data={
        "oai_metadata_map": [
            "static/profiles/*.yaml",
        ],
    },
    include_package_data=True,
    extras_require={
        "cors": ["Flask-CORS==4"],
        "test": ["pytest"],
    },
)
