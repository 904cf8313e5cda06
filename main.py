#main.py

import pygame
import cProfile
import pstats
import constants as C
from graphing_manager import GraphingManager
from image_writer import write_ppm_image, save_png_image
from render_timer import RenderTimer
from renderer import sample_values, pixels_from_values
from ui import draw_loading_screen, make_image_surface
from viewport import Viewport
import logger

def initialize_preview():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log("Pygame initialized successfully.")
    logger.log(f"Creating display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption("Perlin Noise")
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    logger.log("Display surface and font created.")
    return screen, font

def make_progress_callback(screen, font):
    """Redraws the loading bar every few rows and keeps the window responsive."""
    def on_progress(rows_done, total_rows):
        pygame.event.pump()
        if rows_done % C.UI_LOADING_BAR_UPDATE_INTERVAL == 0 or rows_done == total_rows:
            draw_loading_screen(screen, font, rows_done, total_rows)
            pygame.display.flip()
    return on_progress

def render_and_save(width=C.IMAGE_WIDTH, height=C.IMAGE_HEIGHT, viewport=None, timer=None,
                    ppm_path=C.OUTPUT_PPM_PATH, png_path=C.OUTPUT_PNG_PATH,
                    histogram_path=C.OUTPUT_HISTOGRAM_PATH, progress_callback=None):
    """
    Samples the noise field, writes the demo images and the value histogram.

    Returns (pixels_with_grid, pixels_without_grid). A None path skips that output.
    """
    viewport = viewport or Viewport()
    timer = timer or RenderTimer()
    logger.set_render_timer(timer)

    timer.start()
    values = sample_values(width, height, viewport, progress_callback=progress_callback)
    timer.stop()
    logger.log(f"Sampled {width * height} points.")

    gridded = pixels_from_values(values, viewport, draw_grid=True)
    plain = pixels_from_values(values, viewport, draw_grid=False)
    output = gridded if C.DRAW_LATTICE_GRID else plain

    try:
        if ppm_path:
            write_ppm_image(ppm_path, output)
        if png_path:
            save_png_image(png_path, output)
    except OSError as e:
        logger.log(f"ERROR: Could not write image. Reason: {e}")

    graphs = GraphingManager()
    graphs.add_samples(values)
    graphs.log_summary()
    if histogram_path and graphs.has_data():
        graphs.generate_and_save_histogram(histogram_path)

    return gridded, plain

def run_preview(screen, gridded, plain):
    clock = pygame.time.Clock()
    surfaces = {True: make_image_surface(gridded), False: make_image_surface(plain)}
    show_grid = C.DRAW_LATTICE_GRID

    logger.log("CONTROLS: [G] to toggle the lattice grid, [ESC] to quit.")
    running = True
    while running:
        clock.tick(C.CLOCK_TICK_RATE)
        for event in pygame.event.get():
            if event.type == pygame.QUIT: running = False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE: running = False
                if event.key == pygame.K_g:
                    show_grid = not show_grid
                    logger.log(f"Event: Grid overlay {'on' if show_grid else 'off'}.")

        screen.fill(C.COLOR_BLACK)
        screen.blit(surfaces[show_grid], (0, 0))
        pygame.display.flip()

    logger.log("Preview loop ended.")

def shutdown_preview():
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.log("Preview ended cleanly.")

def main():
    logger.log("--- Perlin Demo Start ---")
    screen, font = initialize_preview()
    gridded, plain = render_and_save(progress_callback=make_progress_callback(screen, font))
    run_preview(screen, gridded, plain)
    shutdown_preview()
    logger.log("--- Perlin Demo Exit ---")

if __name__ == '__main__':
    profiler = cProfile.Profile()
    try:
        profiler.run('main()')
    except SystemExit:
        # This allows the demo to exit cleanly without a profiler error
        pass
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        # Sort the stats by the cumulative time spent in each function
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
