"""Simulations of classic network techniques: packet reassembly, CRC, Hamming(7,4),
distance-vector routing, leaky-bucket shaping and a TCP file server and client."""

__version__ = "0.1.0"