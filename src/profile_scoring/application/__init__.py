"""Application layer - scoring services and repository contracts"""
