"""
Core infrastructure for VidPOD: exceptions, logging, paths and validators.
"""
