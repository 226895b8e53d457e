"""Core prompt-building package"""
