"""
Basic seam carving example.

Shrinks an image by a given number of columns and rows and saves the
result, along with a copy of the input showing the first vertical seam.

    python basic_seam_carving.py input.jpg --columns 100 --rows 50
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from seamcarving import Picture, SeamCarver, carve_picture, overlay_seam


def main():
    parser = argparse.ArgumentParser(description="Seam carving demo")
    parser.add_argument('image', help='Input image path')
    parser.add_argument('--columns', type=int, default=50, help='Columns to remove (default: 50)')
    parser.add_argument('--rows', type=int, default=0, help='Rows to remove (default: 0)')
    parser.add_argument('--output-dir', default='output', help='Output directory (default: output)')
    args = parser.parse_args()

    out_dir = Path(args.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    print("Loading image...")
    picture = Picture.open(args.image)
    print(f"Image size: {picture.width} x {picture.height}")

    print("Computing first vertical seam...")
    seam = SeamCarver(picture).find_vertical_seam()
    overlay_seam(picture, seam).save(out_dir / 'with_seam.png')

    def report(carver, seam, direction):
        removed = (picture.width - carver.width) + (picture.height - carver.height)
        if removed % 20 == 0:
            print(f"  Removed {removed} seams, size: {carver.width} x {carver.height}")

    print(f"Carving {args.columns} columns and {args.rows} rows...")
    carved = carve_picture(picture,
                           width=picture.width - args.columns,
                           height=picture.height - args.rows,
                           callback=report)
    carved.save(out_dir / 'carved.png')

    print(f"\nDone! Check the {out_dir}/ directory for results.")


if __name__ == '__main__':
    main()
