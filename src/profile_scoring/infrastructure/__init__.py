"""Infrastructure layer - storage adapters for the host application"""
