[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small simulations of classic computer-network techniques: CRC, Hamming codes, packet reassembly, distance-vector routing, leaky bucket and a TCP file server and client"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "crc", "hamming", "routing", "distance-vector", "leaky-bucket", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlab-packets = "netlab.packets:main"
netlab-crc = "netlab.crc:main"
netlab-hamming = "netlab.hamming:main"
netlab-distance-vector = "netlab.distance_vector:main"
netlab-leaky-bucket = "netlab.leaky_bucket:main"
netlab-file-server = "netlab.filetransfer:server_main"
netlab-file-client = "netlab.filetransfer:client_main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
addopts = "-ra"
