import os
import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd

current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)

def plot_results():
    # 1. 读取数据
    csv_path = os.path.join(project_root, "results", "exp_01_initial_conditions.csv")
    if not os.path.exists(csv_path):
        print(f"Error: Data not found at {csv_path}")
        return

    df = pd.read_csv(csv_path)

    # 2. 开始绘图
    sns.set_theme(style="whitegrid")
    plt.rcParams.update({'font.family': 'sans-serif', 'font.size': 11})

    fig = plt.figure(figsize=(16, 6), dpi=150)
    gs = fig.add_gridspec(1, 2)

    # --- 左图: 被捕食者峰值 ---
    ax1 = fig.add_subplot(gs[0, 0])
    peak_prey = df.pivot(index="Prey_Start", columns="Predator_Start", values="Peak_Prey")
    peak_prey = peak_prey.sort_index(ascending=False)
    sns.heatmap(peak_prey, annot=True, fmt=".1f", cmap="YlGn",
                linewidths=.5, ax=ax1, cbar_kws={'label': 'Peak prey density'})
    ax1.set_title('(a) Peak Prey', fontweight='bold', pad=15)
    ax1.set_xlabel('Initial predator density')
    ax1.set_ylabel('Initial prey density')

    # --- 右图: 捕食者峰值 ---
    ax2 = fig.add_subplot(gs[0, 1])
    peak_pred = df.pivot(index="Prey_Start", columns="Predator_Start", values="Peak_Predator")
    peak_pred = peak_pred.sort_index(ascending=False)
    sns.heatmap(peak_pred, annot=True, fmt=".1f", cmap="YlOrRd",
                linewidths=.5, ax=ax2, cbar_kws={'label': 'Peak predator density'})
    ax2.set_title('(b) Peak Predator', fontweight='bold', pad=15)
    ax2.set_xlabel('Initial predator density')
    ax2.set_ylabel('Initial prey density')

    # 3. 保存
    save_path = os.path.join(current_dir, "exp_01_initial_conditions.png")
    plt.tight_layout()
    plt.savefig(save_path)
    print(f"Plot saved to: {save_path}")

if __name__ == "__main__":
    plot_results()
