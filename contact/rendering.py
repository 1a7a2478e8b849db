from django.shortcuts import render


def render_page(request, view_name, data=None, status=200):
    """
    Render the ``<view_name>.html`` template.

    ``data`` is exposed to the template as ``data``. Missing templates and
    template errors are left to propagate to the error page middleware.
    """
    context = {} if data is None else {"data": data}
    return render(request, f"{view_name}.html", context, status=status)
