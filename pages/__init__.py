"""
Pages App

Static home and contact pages plus their stylesheet and form script.
"""
