"""
Metro Routing - Package Build Script

This script installs the metro_routing package (routing engine + FastAPI service).
"""

from setuptools import setup, find_packages


setup(
    name='metro-routing',
    version='1.0.0',
    author='Metro Routing Team',
    description='Shortest-path routing and itinerary building for metro/rail networks',
    long_description='''
    Builds a distance-weighted undirected graph from station and line data,
    computes Dijkstra shortest paths between stations and splits them into
    per-line itinerary steps with transfer points. Served over FastAPI.
    ''',
    packages=find_packages(include=['metro_routing', 'metro_routing.*']),
    install_requires=[
        'fastapi>=0.100.0',
        'uvicorn>=0.23.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'numpy>=1.24',
        'scipy>=1.10',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24',
            'pytest-cov>=4.0',
        ],
    },
    zip_safe=False,
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: GIS',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
