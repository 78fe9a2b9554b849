[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tutorweb"
version = "0.1.0"
description = "A tutor directory: a JSON web service for teachers and courses, and a web front end that renders it"
requires-python = ">=3.10"
keywords = ["flask", "rest", "teachers", "courses", "sqlalchemy", "web application"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "flask>=2.2",
    "sqlalchemy>=2.0",
    "requests>=2.28",
    "jinja2>=3.1",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
tutorweb-teacher-service = "tutorweb.service.teacher_service:main"
tutorweb-server1 = "tutorweb.service.server1:main"
tutorweb-webapp = "tutorweb.webapp.server:main"

[tool.hatch.build.targets.wheel]
packages = ["tutorweb"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
