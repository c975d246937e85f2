from FrontEnd.styles.design_tokens import CHART


def draw_subject_chart(figure, points, title="Study Time by Subject"):
	"""Draw (subject, minutes) points as bars on a matplotlib Figure.

	Returns the Axes so callers (and tests) can inspect the bars.
	"""
	figure.clear()
	# Transparent to blend with app
	figure.patch.set_facecolor(CHART['figure_bg'])
	figure.patch.set_alpha(0.0)

	ax = figure.add_subplot(111)
	ax.set_facecolor(CHART['axes_bg'])

	x = [subject for subject, _ in points]
	y = [total for _, total in points]
	bars = ax.bar(x, y, color=CHART['bar'], edgecolor=CHART['bar_edge'], linewidth=1.5, alpha=0.9)

	for bar, value in zip(bars, y):
		if value > 0:
			ax.text(bar.get_x() + bar.get_width()/2, bar.get_height(),
			       f'{value}m', ha='center', va='bottom',
			       fontsize=9, fontweight='600', color=CHART['text'])

	ax.set_ylabel("Minutes Studied", fontsize=12, fontweight='600', color=CHART['text'], labelpad=10)
	ax.set_xlabel("Subject", fontsize=12, fontweight='600', color=CHART['text'], labelpad=10)
	ax.set_title(title, fontsize=14, fontweight='bold', color=CHART['text'], pad=15)
	ax.set_ylim(bottom=0)

	# Grid behind bars
	ax.grid(True, axis='y', alpha=0.25, linestyle='--', linewidth=0.8, color=CHART['grid'])
	ax.set_axisbelow(True)
	ax.tick_params(axis='both', colors=CHART['text'], labelsize=10)

	for spine in ['top', 'right']:
		ax.spines[spine].set_visible(False)
	for spine in ['bottom', 'left']:
		ax.spines[spine].set_color(CHART['grid'])
		ax.spines[spine].set_linewidth(1.2)

	if len(x) > 6:
		ax.tick_params(axis='x', rotation=45)

	if not points:
		ax.text(0.5, 0.5, "No sessions to show", transform=ax.transAxes,
		       ha='center', va='center', fontsize=11, color=CHART['text'])

	figure.tight_layout()
	return ax
