"""
Site environment: solar geometry, light attenuation and forcing data
"""
