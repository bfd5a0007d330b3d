from django.urls import path
from . import views

urlpatterns = [
    path('', views.create_game, name='create_game'),
    path('<str:game_id>/', views.game_detail, name='game_detail'),
    path('<str:game_id>/throw/', views.throw_dice, name='throw_dice'),
    path('<str:game_id>/select/<str:dice_index>/', views.select_die, name='select_die'),
    path('<str:game_id>/score-options/', views.score_options, name='score_options'),
    path('<str:game_id>/score/<str:score_type>/', views.add_score, name='add_score'),
    path('<str:game_id>/reset/', views.reset_game, name='reset_game'),
]
