import numpy as np

# --- Lotka-Volterra 速率系数 ---
A = 0.1      # 被捕食者增长率 (prey growth rate)
B = 0.02     # 捕食率 (predation rate)
D = 0.01     # 捕食者由捕食获得的增长率
G = 0.1      # 捕食者死亡率

# --- 积分参数 (参考配置) ---
T0 = 0.0
DT = 0.1
STEPS = 100

# --- 状态向量 ---
STATE_COLUMNS = ("Prey", "Predator")
STATE_DTYPE = np.float64

# --- 输出 ---
TABLE_PRECISION = 2
CSV_FLOAT_FORMAT = "%.4f"
RESULTS_DIR = "results"
