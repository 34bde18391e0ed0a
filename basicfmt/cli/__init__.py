# basicfmt/cli/__init__.py
# Typer command-line front end
