"""
Admin area: header, tab bar and the routed create/edit forms.

Usage:
    from screens.admin import layout

    layout.render(state, engine)
"""
