from rest_framework import renderers


class PassthroughRenderer(renderers.BaseRenderer):
    """Accept any client media type for views that build their own HttpResponse"""

    media_type = '*/*'
    format = ''

    def render(self, data, accepted_media_type=None, renderer_context=None):
        return data
