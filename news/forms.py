from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from .models import Comment


class CommentForm(forms.ModelForm):
    """Форма комментария: привязка и валидация присланных полей"""

    class Meta:
        model = Comment
        fields = ['name', 'email', 'url', 'content']

    def clean(self):
        cleaned_data = super().clean()
        # Из JSON могут прийти объекты и массивы, CharField превратил бы их в строку
        for name in self.fields:
            if isinstance(self.data.get(name), (dict, list)):
                self.add_error(name, ValidationError(_('Enter a text value.'), code='invalid'))
        return cleaned_data

    def error_dict(self):
        """Ошибки по полям: {field: [{"message": ..., "code": ...}]}"""
        return {
            field: [{'message': str(error['message']), 'code': error['code'] or 'invalid'} for error in errors]
            for field, errors in self.errors.get_json_data().items()
        }
