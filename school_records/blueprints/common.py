from flask import current_app, flash, get_flashed_messages, redirect, render_template, request, url_for


def form_payload(schema):
    return {f.key: (request.form.get(f.key) or "").strip() for f in schema.fields}


def reject(page, message):
    current_app.logger.info("Rejected %s submission: %s", page, message)
    flash(message, "error")
    return redirect(url_for(f"{page}.validation"))


def render_validation(page, title):
    # flashed messages are read once; a reload shows nothing
    messages = get_flashed_messages(category_filter=["error"])
    return render_template("validation.html", page=page, title=title,
                           message=messages[0] if messages else None)
