"""
Helpers turning unbound forms into POST data.

Views receive complete forms, so tests start from what the form
would render and only override the values under test.
"""

from django import forms


def form_data(form) -> dict:
    """
    Return the POST data a browser would send for ``form`` unchanged.
    """
    data = {}
    for name, field in form.fields.items():
        key = form.add_prefix(name)
        value = form[name].value()
        if isinstance(field, forms.BooleanField):
            if value:
                data[key] = "on"
        elif isinstance(value, (list, tuple)):
            data[key] = [str(v) for v in value]
        elif value is None:
            data[key] = ""
        else:
            data[key] = str(value)
    return data


def formset_data(formset) -> dict:
    """
    Return the POST data of ``formset``, management form included.
    """
    data = form_data(formset.management_form)
    for form in formset.forms:
        data.update(form_data(form))
    return data
