"""Render Jinja2 templates shipped in a caller's ``templates`` subpackage."""

import importlib.resources

import jinja2

_ENVIRONMENT = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Load *template_name* from ``{package}.templates`` and render it.

    Args:
        template_name: Template filename (e.g. "server.js.j2")
        package: The caller's package (pass __package__).
        **kwargs: Template variables. Referencing a variable that was not
            passed raises jinja2.UndefinedError.

    Returns:
        The rendered template string.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    templates = importlib.resources.files(f"{package}.templates")
    template_path = templates.joinpath(template_name)
    if not template_path.is_file():
        raise FileNotFoundError(f"Template not found: {template_name} in {package}.templates")
    source = template_path.read_text(encoding="utf-8")
    return _ENVIRONMENT.from_string(source).render(**kwargs)
