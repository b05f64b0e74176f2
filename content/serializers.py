from rest_framework import serializers

from .hooks import display_post_states
from .models import Post


class PostSerializer(serializers.ModelSerializer):
    post_states = serializers.SerializerMethodField()

    class Meta:
        model = Post
        fields = [
            'id', 'title', 'slug', 'post_type', 'status',
            'post_states', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_post_states(self, obj):
        states = display_post_states.apply({}, obj)
        return {key: str(label) for key, label in states.items()}
