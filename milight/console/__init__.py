from .application import app, main
