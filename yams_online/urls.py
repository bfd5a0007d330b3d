from django.urls import include, path

urlpatterns = [
    path('games/', include('game.urls')),
]
