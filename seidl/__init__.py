"""seidl - query public cloud images for GCE, AWS and Azure"""

__version__ = "0.1"
