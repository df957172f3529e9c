"""
Protocol-wide constants.
"""

# Length of a protocol label in bytes
LABEL_LENGTH = 32

# Length of a Fiat-Shamir challenge in bytes
CHALLENGE_LENGTH = 32

# Domain separator identifying the version of the standard
DOMSEP = b"zkpstd/sigma/0.1"
