# src/nbprates/__main__.py
from nbprates.app import main

main()
