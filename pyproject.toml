[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portfolio_site"
version = "0.1.0"
description = "Portfolio website backend: content entities, JSON views and a small WSGI application with health check and content routes."
requires-python = ">=3.10"
dependencies = []
keywords = ["portfolio", "wsgi", "web", "healthcheck", "resume"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
portfolio-site = "portfolio_site.app:main"

[tool.hatch.build.targets.wheel]
packages = ["portfolio_site"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
