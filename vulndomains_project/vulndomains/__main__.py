# vulndomains/__main__.py
from vulndomains.scan import main

main()
