#ui.py

import pygame
import constants as C

def draw_loading_screen(screen, font, progress, total):
    """Draws a progress bar and loading text. The caller flips the display."""
    screen.fill(C.COLOR_BLACK)
    screen_width, screen_height = screen.get_size()

    # Render text
    text_surface = font.render("Rendering Noise...", True, C.COLOR_WHITE)
    text_rect = text_surface.get_rect(center=(screen_width / 2, screen_height / 2 - C.UI_LOADING_TEXT_OFFSET_Y))
    screen.blit(text_surface, text_rect)

    # Draw progress bar
    bar_x = (screen_width - C.UI_LOADING_BAR_WIDTH) / 2
    bar_y = (screen_height - C.UI_LOADING_BAR_HEIGHT) / 2

    progress_ratio = min(1.0, progress / total) if total else 1.0
    current_bar_width = C.UI_LOADING_BAR_WIDTH * progress_ratio

    # Background of the bar
    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_BG, (bar_x, bar_y, C.UI_LOADING_BAR_WIDTH, C.UI_LOADING_BAR_HEIGHT))
    # Foreground of the bar
    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_FG, (bar_x, bar_y, current_bar_width, C.UI_LOADING_BAR_HEIGHT))
    return progress_ratio

def make_image_surface(pixels):
    """Wraps (height, width, 3) pixels in a pygame surface (pygame wants width first)."""
    return pygame.surfarray.make_surface(pixels.transpose(1, 0, 2))
